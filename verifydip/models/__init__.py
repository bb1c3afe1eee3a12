from verifydip.models.user import UserRow
from verifydip.models.ip_asset import IpAssetRow
from verifydip.models.royalty_payment import RoyaltyPaymentRow
from verifydip.models.derivative_work import DerivativeWorkRow
