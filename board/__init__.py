"""Bulletin board application package.

Posts, replies and member accounts live here, together with the attachment
store that keeps uploaded files in step with their posts.
"""
