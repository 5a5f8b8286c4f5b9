"""
Search Controller
"""

# Services
from .services.search_service import SearchService





class SearchController:

    def search(self, args: dict) -> dict:
        return SearchService().search(args["q"])
