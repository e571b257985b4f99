"""
Sistema Financiero - Weekly Budget & Lending Contract Service

A FastAPI-based service that tracks weekly budgets, income/expense
transactions and loan contracts with their clients and guarantors.
"""

__version__ = "0.1.0"
