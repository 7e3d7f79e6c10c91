"""
eShop catalog service and service-to-service HTTP defaults.
"""
