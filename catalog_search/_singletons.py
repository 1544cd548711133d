# catalog_search/_singletons.py
from functools import lru_cache
from .catalog_build import load_catalog_snapshot

@lru_cache(maxsize=1)
def get_catalog_df():
    return load_catalog_snapshot()
