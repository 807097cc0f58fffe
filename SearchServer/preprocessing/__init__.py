"""
Preprocessing module for text processing in the search server.
Includes word splitting and validation, stop word filtering and the document model.
"""
