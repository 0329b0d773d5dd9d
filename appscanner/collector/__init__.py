"""Collector package for appscanner.

Lists labelled resources from the Kubernetes API for the parsers.

Submodules
----------
lister -- kube config loading, Deployment and Flux Kustomization listing.
"""
