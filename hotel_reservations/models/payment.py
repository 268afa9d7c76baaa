"""Payment method models.

Charges are simulated: each variant checks the shape of its own
credentials and reports success or failure. A declined charge is a
normal ``False`` result, never an exception.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from hotel_reservations.logging import get_logger

logger = get_logger(__name__)

MIN_CARD_NUMBER_LENGTH = 13
MIN_CVV_LENGTH = 3
MIN_PIN_LENGTH = 4
MIN_WALLET_LENGTH = 20
MIN_ACCOUNT_NUMBER_LENGTH = 8
MIN_BANK_CODE_LENGTH = 4


def _last_four(value: str) -> str:
    return value[-4:]


class PaymentMethodBase(BaseModel, ABC):
    """Common charge flow shared by all payment variants."""

    def charge(self, amount: Decimal) -> bool:
        """
        Attempt a single synchronous charge.

        Args:
            amount: Amount to charge, must be positive

        Returns:
            True if the charge went through
        """
        if amount <= 0:
            logger.warning(
                "payment_rejected_non_positive_amount",
                payment_method=self.display_name,
                amount=str(amount),
            )
            return False

        if not self._credentials_valid():
            logger.info(
                "payment_declined",
                payment_method=self.display_name,
                amount=str(amount),
            )
            return False

        logger.info(
            "payment_charged",
            payment_method=self.display_name,
            amount=str(amount),
            details=self.describe(),
        )
        return True

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable name of the payment method."""

    @abstractmethod
    def describe(self) -> str:
        """Redacted summary; never contains full credentials."""

    @abstractmethod
    def _credentials_valid(self) -> bool:
        pass


class CreditCardPayment(PaymentMethodBase):
    """Credit card payment."""

    kind: Literal["credit_card"] = "credit_card"
    card_number: str = Field(repr=False)
    holder_name: str
    expiry: str = Field(description="MM/YY")
    cvv: str = Field(repr=False)

    @property
    def display_name(self) -> str:
        return "Credit Card"

    def describe(self) -> str:
        return f"Card holder {self.holder_name} (last 4 digits: {_last_four(self.card_number)})"

    def _credentials_valid(self) -> bool:
        return (
            len(self.card_number) >= MIN_CARD_NUMBER_LENGTH
            and len(self.cvv) >= MIN_CVV_LENGTH
        )


class DebitCardPayment(PaymentMethodBase):
    """Debit card payment."""

    kind: Literal["debit_card"] = "debit_card"
    card_number: str = Field(repr=False)
    holder_name: str
    pin: str = Field(repr=False)

    @property
    def display_name(self) -> str:
        return "Debit Card"

    def describe(self) -> str:
        return f"Debit card holder {self.holder_name} (last 4 digits: {_last_four(self.card_number)})"

    def _credentials_valid(self) -> bool:
        return (
            len(self.card_number) >= MIN_CARD_NUMBER_LENGTH
            and len(self.pin) >= MIN_PIN_LENGTH
        )


class CryptocurrencyPayment(PaymentMethodBase):
    """Cryptocurrency wallet payment."""

    kind: Literal["cryptocurrency"] = "cryptocurrency"
    currency: str = Field(description="Bitcoin, Ethereum, ...")
    wallet_address: str = Field(repr=False)

    @property
    def display_name(self) -> str:
        return f"Cryptocurrency ({self.currency})"

    def describe(self) -> str:
        return f"{self.currency} wallet {self.wallet_address[:10]}..."

    def _credentials_valid(self) -> bool:
        return len(self.wallet_address) >= MIN_WALLET_LENGTH


class BankTransferPayment(PaymentMethodBase):
    """Bank transfer payment."""

    kind: Literal["bank_transfer"] = "bank_transfer"
    account_number: str = Field(repr=False)
    bank_name: str
    bank_code: str

    @property
    def display_name(self) -> str:
        return "Bank Transfer"

    def describe(self) -> str:
        return (
            f"Transfer to {self.bank_name} "
            f"(code: {self.bank_code}, account: ****{_last_four(self.account_number)})"
        )

    def _credentials_valid(self) -> bool:
        return (
            len(self.account_number) >= MIN_ACCOUNT_NUMBER_LENGTH
            and len(self.bank_code) >= MIN_BANK_CODE_LENGTH
        )


PaymentMethod = Annotated[
    Union[
        CreditCardPayment,
        DebitCardPayment,
        CryptocurrencyPayment,
        BankTransferPayment,
    ],
    Field(discriminator="kind"),
]
