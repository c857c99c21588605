"""
Search core package.

- analyzers: text normalization and tokenization
- stopwords: per-language stopword tables
- query: filter extraction and keyword weighting
- records: record model and field kinds
- cache: keyword vocabulary
- storage / sqlite_storage: storage adapter contract and bundled adapters
- database: keyword cache maintenance over a storage adapter
- fuzzy: edit distance keyword correction
- engine: quick and normal search strategies
"""
