"""OpenAPI reference rendered with Redocusaurus."""

from specment.features.base import FeatureIntegration, SiteContribution
from specment.generators.records import NavItem, Preset
from specment.locales import Language
from specment.models import ContentFile

PLUGIN = "redocusaurus"
SPEC_PATH = "static/openapi.yaml"
API_ROUTE = "/api/"

SAMPLE_OPENAPI = """openapi: 3.0.3
info:
  title: {{projectName}} API
  description: |
    Sample API specification for {{projectName}}.
  version: 1.0.0
  license:
    name: MIT
    url: https://opensource.org/licenses/MIT

servers:
  - url: https://api.example.com/v1
    description: Production server

paths:
  /users:
    get:
      summary: Get list of users
      tags:
        - Users
      parameters:
        - name: limit
          in: query
          required: false
          schema:
            type: integer
            minimum: 1
            maximum: 100
            default: 20
      responses:
        '200':
          description: List of users
          content:
            application/json:
              schema:
                type: object
                properties:
                  users:
                    type: array
                    items:
                      $ref: '#/components/schemas/User'
                  total:
                    type: integer
        '400':
          description: Invalid request parameters
          content:
            application/json:
              schema:
                $ref: '#/components/schemas/Error'

components:
  schemas:
    User:
      type: object
      required:
        - id
        - name
      properties:
        id:
          type: integer
        name:
          type: string
        email:
          type: string
          format: email
    Error:
      type: object
      required:
        - code
        - message
      properties:
        code:
          type: string
        message:
          type: string
"""


class RedocIntegration(FeatureIntegration):
    name = "redoc"
    config_key = "redocusaurus"
    plugin = PLUGIN
    display_name = {Language.EN: "Redoc (Redocusaurus)", Language.JA: "Redoc (Redocusaurus)"}
    description = {
        Language.EN: "OpenAPI documentation with Redoc",
        Language.JA: "OpenAPI仕様書のRedoc表示",
    }

    def default_config(self):
        return {
            "specs": [
                {"id": "api-spec", "spec": SPEC_PATH, "route": API_ROUTE},
            ],
            "theme": {"primaryColor": "#1976d2"},
        }

    def dependencies(self):
        return {PLUGIN: "^2.0.0"}

    def scripts(self):
        return {"api:validate": 'echo "API specification validation"'}

    def site_contribution(self, feature):
        config = self.resolve_config(feature)
        route = config["specs"][0]["route"]
        return SiteContribution(
            presets=[Preset(PLUGIN, {"specs": config["specs"], "theme": config["theme"]})],
            navbar_items=[NavItem(label="API", position="left", to=route)],
        )

    def extra_files(self, feature):
        return [ContentFile(SPEC_PATH, SAMPLE_OPENAPI, is_template=True)]

    def validate_config(self, config):
        specs = config.get("specs")
        if not specs:
            return "At least one OpenAPI spec must be configured"
        for spec in specs:
            if not spec.get("spec") or not spec.get("route"):
                return 'Each spec must have both "spec" and "route" properties'
            if not spec["route"].startswith("/"):
                return 'Route must start with "/"'
        return None
