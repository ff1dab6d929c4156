"""
Intern records: bulk reconciliation and public verification.
"""
