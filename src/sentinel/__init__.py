"""
SecurePay Sentinel - Fraud Monitoring Backend

A transaction monitoring service that:
- Scores submitted transactions against a rule-based risk policy
- Routes high-risk transactions to review with a plain-language explanation
- Keeps an append-only audit trail of security events
- Summarizes activity for the admin dashboard
"""

__version__ = "0.1.0"
