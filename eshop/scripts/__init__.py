"""
Scripts Module

Management utilities and CLI tools including:
- Catalog lookup data seeding
"""
