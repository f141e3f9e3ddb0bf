"""
RPS Match GUI styles

Theme constants and stylesheet helpers.
"""
