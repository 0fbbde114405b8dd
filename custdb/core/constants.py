"""
Application-wide constants.

Table and column names live here so the model, the schema bootstrap and the
tests all agree on them.
"""


# ========================================
# Customers Table
# ========================================

CUSTOMERS_TABLE = "customers"

COLUMN_ID = "id"
COLUMN_NAME = "name"

# ========================================
# Identifier Range
# ========================================

# ids are stored as BIGINT
MIN_CUSTOMER_ID = -(2 ** 63)
MAX_CUSTOMER_ID = 2 ** 63 - 1
