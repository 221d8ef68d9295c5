"""specment - scaffold Docusaurus specification documentation sites."""

__version__ = "0.3.0"
