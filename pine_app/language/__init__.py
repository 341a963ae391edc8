"""
Script language front end.

Built-in catalog, value and type inference, expression parsing and
line-by-line statement classification into a Program.
"""
