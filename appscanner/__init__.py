"""appscanner — discover applications and delivery pipelines from Kubernetes labels."""

__version__ = "0.1.0"
