from bhaojan_client.flows.delivery import (
    OTP_LENGTH,
    DeliveryHandoff,
    HandoffStage,
    is_complete_otp,
)

__all__ = ["OTP_LENGTH", "DeliveryHandoff", "HandoffStage", "is_complete_otp"]
