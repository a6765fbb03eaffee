"""Follow use cases."""

from .follow_package import FollowPackageUseCase
from .get_following import GetFollowingUseCase
from .unfollow_package import UnfollowPackageUseCase

__all__ = ["FollowPackageUseCase", "GetFollowingUseCase", "UnfollowPackageUseCase"]
