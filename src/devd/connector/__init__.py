"""
The connector knows how to reach an endpoint, and provides the conduit to it once connected.
"""
