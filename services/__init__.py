"""
Jobly Services

This package contains the store services:
- shared: database access, SQL clause builders, errors, logging
- jobs: job store with filtered search
- companies: company store
"""
