"""Cluster infrastructure package.

- static_membership.py: Leader location from configuration
- http_node_reader.py: Schema reads against a node's REST API (httpx)
"""
