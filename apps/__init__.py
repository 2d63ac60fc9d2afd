"""
Django applications local to the CloudAppHive API.
"""
