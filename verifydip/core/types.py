from enum import Enum


class AssetType(str, Enum):
    design = "design"
    song = "song"


class IpAssetStatus(str, Enum):
    pending = "pending"
    registered = "registered"
    failed = "failed"


class RoyaltyStatus(str, Enum):
    pending = "pending"
    claimed = "claimed"
    failed = "failed"
