from .search import SearchInput, SearchOutput
