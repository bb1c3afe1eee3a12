from verifydip.schemas.users import User, UserCreate
from verifydip.schemas.ip_assets import IpAsset, IpAssetCreate, IpAssetUpdate
from verifydip.schemas.royalties import RoyaltyPayment, RoyaltyPaymentCreate, RoyaltyPaymentUpdate
from verifydip.schemas.derivatives import DerivativeWork, DerivativeWorkCreate
