from userbase.factories.user_factory import UserFactory

__all__ = ["UserFactory"]
