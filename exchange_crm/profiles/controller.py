"""
Profile Controller
"""

# Services
from .services.profile_service import ProfileService





class ProfileController:

    def __init__(self):
        self.service = ProfileService()


    def list_profiles(self, search: str = None) -> dict:
        return self.service.list_profiles(search)


    def get_profile(self, profile_id: int) -> dict:
        return self.service.get_profile(profile_id)


    def create_profile(self, args: dict) -> dict:
        return self.service.create_profile(args)


    def update_profile(self, profile_id: int, args: dict) -> dict:
        return self.service.update_profile(profile_id, args)
