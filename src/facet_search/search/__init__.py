"""
Query execution building blocks.

Each stage of a search is a small pure function over documents:
- filters: type and any-of tag filtering of the candidate set
- scoring: substring-count relevance scoring with phrase boosting
- highlight: markup around matched query words
- facets: value counts over the result set
- sorting: multi-key stable sort and pagination
"""
