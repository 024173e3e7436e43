"""
Uploads bounded context.

Covers naming, validation and storage of user-uploaded media
(profile pictures, payment proofs).
"""
