"""Host use cases."""

from .transfer_host import TransferHostRequest, TransferHostUseCase

__all__ = ["TransferHostRequest", "TransferHostUseCase"]
