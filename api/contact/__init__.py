"""
Contact form: store the submission, notify the team, auto-reply.
"""
