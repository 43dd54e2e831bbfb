"""
gnormalizer tests

Covers line classification, identifier normalization, sync and async
edge streams, configuration loading, writers and the file pipeline.
"""
