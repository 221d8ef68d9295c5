"""package.json synthesis."""

import copy
import json
import logging
from typing import Any, Dict

from specment.features import get_integration
from specment.models import UserSelections

logger = logging.getLogger(__name__)

BASE_SCRIPTS = {
    "docusaurus": "docusaurus",
    "start": "docusaurus start",
    "build": "docusaurus build",
    "swizzle": "docusaurus swizzle",
    "deploy": "docusaurus deploy",
    "clear": "docusaurus clear",
    "serve": "docusaurus serve",
    "write-translations": "docusaurus write-translations",
    "write-heading-ids": "docusaurus write-heading-ids",
    "dev": "docusaurus start",
    "preview": "docusaurus serve",
    "typecheck": "tsc --noEmit",
    "lint": "eslint src --ext .ts,.tsx,.js,.jsx",
    "lint:fix": "eslint src --ext .ts,.tsx,.js,.jsx --fix",
    "format": 'prettier --write "src/**/*.{ts,tsx,js,jsx,md,mdx}"',
    "format:check": 'prettier --check "src/**/*.{ts,tsx,js,jsx,md,mdx}"',
}

BASE_DEPENDENCIES = {
    "@docusaurus/core": "^3.0.0",
    "@docusaurus/preset-classic": "^3.0.0",
    "@mdx-js/react": "^3.0.0",
    "clsx": "^2.0.0",
    "prism-react-renderer": "^2.3.0",
    "react": "^18.0.0",
    "react-dom": "^18.0.0",
}

BASE_DEV_DEPENDENCIES = {
    "@docusaurus/module-type-aliases": "^3.0.0",
    "@docusaurus/tsconfig": "^3.0.0",
    "@docusaurus/types": "^3.0.0",
    "@types/react": "^18.0.0",
    "@types/react-dom": "^18.0.0",
    "typescript": "^5.0.0",
    "eslint": "^8.0.0",
    "@typescript-eslint/eslint-plugin": "^6.0.0",
    "@typescript-eslint/parser": "^6.0.0",
    "prettier": "^3.0.0",
}

BROWSERSLIST = {
    "production": [">0.5%", "not dead", "not op_mini all"],
    "development": [
        "last 3 chrome version",
        "last 3 firefox version",
        "last 5 safari version",
    ],
}

NODE_ENGINE = ">=20.0"


def generate_manifest(selections: UserSelections) -> Dict[str, Any]:
    """Build package.json contents for the selections.

    Enabled features add dependencies and scripts on top of the base.
    Later features win on duplicate keys.
    """
    manifest: Dict[str, Any] = {
        "name": selections.project_name,
        "version": "0.0.0",
        "private": True,
        "scripts": dict(BASE_SCRIPTS),
        "dependencies": dict(BASE_DEPENDENCIES),
        "devDependencies": dict(BASE_DEV_DEPENDENCIES),
        "browserslist": copy.deepcopy(BROWSERSLIST),
        "engines": {"node": NODE_ENGINE},
    }

    for feature in selections.enabled_features:
        integration = get_integration(feature.name)
        if integration is None:
            logger.warning("No integration registered for feature '%s'", feature.name)
            continue
        manifest["dependencies"].update(integration.dependencies())
        manifest["devDependencies"].update(integration.dev_dependencies())
        manifest["scripts"].update(integration.scripts())

    return manifest


def render_manifest(manifest: Dict[str, Any]) -> str:
    return json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"
