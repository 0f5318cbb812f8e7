"""oc_nav: interactive menu navigator for the OpenShift CLI."""

__version__ = "0.1.0"
