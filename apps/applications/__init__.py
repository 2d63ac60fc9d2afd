"""
apps.applications – registration and listing of cloud application configs.
"""
