"""
Adapters around the host domain (config, ssh, cli)
"""
