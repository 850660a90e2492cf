from quizflip.services.ownership import authorize, cascade_delete_category

__all__ = ["authorize", "cascade_delete_category"]
