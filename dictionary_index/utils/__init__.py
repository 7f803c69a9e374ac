# dictionary_index/utils/__init__.py
# persistence, normalization, config and logging helpers
