"""
API module for SecurePay Sentinel.

Provides REST API routes for:
- Transaction submission and history
- Fraud alert review
- Admin dashboard statistics
- Audit logging
"""
