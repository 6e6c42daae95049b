"""
kubegroups - derives owner-based entity groups for pods and containers
"""

__version__ = "0.1.0"
