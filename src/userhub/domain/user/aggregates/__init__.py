from userhub.domain.user.aggregates.user import ADULT_AGE, User

__all__ = ["ADULT_AGE", "User"]
