"""
Services Package
================

Business logic layer.

Available services:
- CustomerService: bootstraps the customers table, creates and lists customers
"""

from custdb.services.customers import CustomerService, get_customer_service

__all__ = [
    "CustomerService",
    "get_customer_service",
]
