"""
TF-IDF search module: the inverted index, query parsing and the search server.
Ranks documents by the sum of TF-IDF weights of the query words they contain.
"""
