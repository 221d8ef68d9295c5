"""Fixed supporting files: stylesheet, README, .gitignore."""

CUSTOM_CSS = """/**
 * Any CSS included here will be global. The classic template
 * bundles Infima by default. Infima is a CSS framework designed to
 * work well for content-centric websites.
 */

/* You can override the default Infima variables here. */
:root {
  --ifm-color-primary: #2e8555;
  --ifm-color-primary-dark: #29784c;
  --ifm-color-primary-darker: #277148;
  --ifm-color-primary-darkest: #205d3b;
  --ifm-color-primary-light: #33925d;
  --ifm-color-primary-lighter: #359962;
  --ifm-color-primary-lightest: #3cad6e;
  --ifm-code-font-size: 95%;
  --docusaurus-highlighted-code-line-bg: rgba(0, 0, 0, 0.1);
}

/* For readability concerns, you should choose a lighter palette in dark mode. */
[data-theme='dark'] {
  --ifm-color-primary: #25c2a0;
  --ifm-color-primary-dark: #21af90;
  --ifm-color-primary-darker: #1fa588;
  --ifm-color-primary-darkest: #1a8870;
  --ifm-color-primary-light: #29d5b0;
  --ifm-color-primary-lighter: #32d8b4;
  --ifm-color-primary-lightest: #4fddbf;
  --docusaurus-highlighted-code-line-bg: rgba(0, 0, 0, 0.3);
}
"""

README_TEMPLATE = """# {{projectName}}

This documentation site was created with [create-specment](https://github.com/plenarc/create-specment).

## Project Information

- **Project Name**: {{projectName}}
- **Created**: {{date}}
- **Author**: {{author}}

## Getting Started

```bash
{{installCommand}}
{{runCommand}} start
```

## Build

```bash
{{runCommand}} build
```

## Preview

```bash
{{runCommand}} serve
```
{{#i18n}}
## Translations

```bash
{{runCommand}} translate
```
{{/i18n}}
## Documentation

This project uses Docusaurus. Learn more at [docusaurus.io](https://docusaurus.io/).
"""

GITIGNORE = """# Dependencies
node_modules/
.pnp
.pnp.js

# Production
/build

# Generated files
.docusaurus
.cache-loader
.cache

# Misc
.DS_Store
.env.local
.env.development.local
.env.test.local
.env.production.local

npm-debug.log*
yarn-debug.log*
yarn-error.log*
pnpm-debug.log*
"""
