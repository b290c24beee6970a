"""
Wallet edge functions client.

Thin aiohttp client for the Supabase Edge Functions backing the wallet:
- Profile / security state
- Transaction PIN setup and verification
- Withdrawal initiation and status
- Payout methods and balances

The remote service owns every durable value (balances, locks, PIN
hash); this client only forwards requests and decodes responses.
"""

import asyncio
from decimal import Decimal
from typing import Any

import aiohttp
from loguru import logger

from wallet.config.business_constants import EdgeFunction
from wallet.config.settings import Settings, settings as default_settings
from wallet.models.security import PayoutMethod, SecurityState, WalletBalance
from wallet.utils.exceptions import NetworkError, RemoteRejectionError
from wallet.utils.security import mask_pin


class WalletFunctionsClient:
    """
    Client for wallet-related Supabase Edge Functions.

    Each call is a single HTTP round trip; nothing is retried.
    """

    def __init__(
        self,
        config: Settings | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """
        Initialize wallet functions client.

        Args:
            config: Settings instance (defaults to global settings)
            session: Optional externally managed aiohttp session
        """
        self.config = config or default_settings
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "WalletFunctionsClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            timeout = None
            if self.config.http_timeout_seconds is not None:
                timeout = aiohttp.ClientTimeout(
                    total=self.config.http_timeout_seconds
                )
            if timeout is not None:
                self._session = aiohttp.ClientSession(timeout=timeout)
            else:
                self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    def _headers(self) -> dict[str, str]:
        """Build auth headers for an edge function call."""
        token = self.config.supabase_access_token or self.config.supabase_anon_key
        return {
            "Authorization": f"Bearer {token}",
            "apikey": self.config.supabase_anon_key,
            "Content-Type": "application/json",
        }

    async def invoke(
        self,
        function_name: str,
        body: dict[str, Any] | None = None,
        method: str = "POST",
        params: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """
        Invoke an edge function and decode its JSON payload.

        A non-2xx response whose body is an explicit
        ``{"success": false, ...}`` envelope is returned as-is so the
        caller can interpret the rejection. Any other non-2xx response
        or transport failure raises NetworkError.

        Args:
            function_name: Edge function name
            body: JSON body
            method: HTTP method
            params: Query string parameters

        Returns:
            Decoded JSON object

        Raises:
            NetworkError: On transport failure or unexpected status
        """
        url = f"{self.config.functions_base_url}/{function_name}"
        session = await self._get_session()

        try:
            async with session.request(
                method,
                url,
                json=body,
                params=params,
                headers=self._headers(),
            ) as response:
                try:
                    payload = await response.json(content_type=None)
                except (aiohttp.ContentTypeError, ValueError):
                    payload = None

                if response.status >= 400:
                    if isinstance(payload, dict) and payload.get("success") is False:
                        logger.warning(
                            f"Edge function {function_name} rejected request: "
                            f"HTTP {response.status}, {payload.get('error')}"
                        )
                        return payload
                    message = None
                    if isinstance(payload, dict):
                        message = payload.get("error") or payload.get("message")
                    logger.error(
                        f"Edge function {function_name} failed: "
                        f"HTTP {response.status}"
                    )
                    raise NetworkError(
                        message or f"Edge function {function_name} "
                        f"returned HTTP {response.status}",
                        status=response.status,
                    )

                if not isinstance(payload, dict):
                    raise NetworkError(
                        f"Edge function {function_name} returned "
                        f"a non-JSON response",
                        status=response.status,
                    )
                return payload

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Edge function {function_name} request failed: {e}")
            raise NetworkError(str(e) or "Network request failed") from e

    # === Profile & security ===

    async def get_profile(self) -> dict[str, Any]:
        """
        Fetch the current user's profile record.

        Returns:
            Profile dict

        Raises:
            RemoteRejectionError: If the function reports failure
        """
        data = await self.invoke(EdgeFunction.GET_PROFILE)
        if not data.get("success") or not data.get("profile"):
            raise RemoteRejectionError(data.get("error") or "Profile not found")
        return data["profile"]

    async def get_security_state(self) -> SecurityState:
        """
        Fetch profile and derive the withdrawal security state.

        Raises:
            RemoteRejectionError: If the profile carries malformed
                security fields
        """
        profile = await self.get_profile()
        try:
            return SecurityState.from_profile(profile)
        except ValueError as e:
            logger.error(f"Malformed security fields in profile: {e}")
            raise RemoteRejectionError(
                "Could not read account security state"
            ) from e

    async def verify_pin(self, pin: str) -> bool:
        """
        Ask the remote verifier whether pin matches the stored hash.

        Args:
            pin: 4-digit PIN

        Returns:
            True if verified
        """
        logger.debug(f"Verifying transaction PIN {mask_pin(pin)}")
        data = await self.invoke(EdgeFunction.VERIFY_PIN, {"pin": pin})
        return bool(data.get("success"))

    async def setup_pin(self, pin: str) -> bool:
        """
        Store a new transaction PIN remotely.

        Args:
            pin: 4-digit PIN

        Returns:
            True if the PIN was set
        """
        data = await self.invoke(EdgeFunction.SETUP_PIN, {"pin": pin})
        return bool(data.get("success"))

    # === Withdrawals ===

    async def initiate_withdrawal(
        self,
        payout_method_id: str,
        amount: Decimal,
        description: str,
        pin: str | None = None,
    ) -> dict[str, Any]:
        """
        Submit a withdrawal for processing.

        Args:
            payout_method_id: Payout method reference
            amount: Withdrawal amount
            description: Transfer description
            pin: Verified PIN for server-side re-verification

        Returns:
            Raw response dict ({success, data} or {success, error})
        """
        body: dict[str, Any] = {
            "payout_method_id": payout_method_id,
            "amount": float(amount),
            "description": description,
        }
        if pin is not None:
            body["pin"] = pin
        return await self.invoke(EdgeFunction.INITIATE_WITHDRAWAL, body)

    async def get_withdrawal_status(self, transaction_id: str) -> dict[str, Any]:
        """
        Fetch status of a withdrawal transaction.

        Args:
            transaction_id: Withdrawal transaction ID

        Returns:
            Transaction dict
        """
        data = await self.invoke(
            EdgeFunction.GET_WITHDRAWAL_STATUS,
            method="GET",
            params={"id": transaction_id},
        )
        if data.get("success") is False:
            raise RemoteRejectionError(data.get("error"))
        return data.get("transaction") or data

    # === Wallet data ===

    async def get_payout_methods(self) -> list[PayoutMethod]:
        """Fetch the user's payout methods, primary first."""
        data = await self.invoke(EdgeFunction.GET_PAYOUT_METHODS)
        methods = [
            PayoutMethod.model_validate(item)
            for item in data.get("payoutMethods") or []
        ]
        return sorted(methods, key=lambda m: not m.is_primary)

    async def get_wallet_balance(self) -> WalletBalance:
        """Fetch the user's wallet balance."""
        data = await self.invoke(EdgeFunction.GET_WALLET_BALANCE)
        balance = data.get("balance") or {}
        return WalletBalance.model_validate(balance)
