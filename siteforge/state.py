"""Process-scoped state: the stores and services one running app shares."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from siteforge.config import Settings, get_settings
from siteforge.generation import SiteGenerator, StreamDriver
from siteforge.jobs import InMemoryJobStore, JobStore
from siteforge.llm import GeminiProvider, SiteProvider
from siteforge.orders import InMemoryOrderStore, OrderStore, demo_orders
from siteforge.payments import RazorpayGateway

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    settings: Settings
    jobs: JobStore
    orders: OrderStore
    generator: SiteGenerator
    driver: StreamDriver
    gateway: RazorpayGateway
    http: httpx.AsyncClient

    async def aclose(self) -> None:
        await self.http.aclose()


def build_state(
    settings: Settings | None = None,
    *,
    http: httpx.AsyncClient | None = None,
    provider: SiteProvider | None = None,
) -> AppState:
    """Wire stores and services from settings. ``http``/``provider`` can be injected for tests."""
    settings = settings or get_settings()
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; generation requests will fail.")
    if not settings.razorpay_key_id or not settings.razorpay_key_secret:
        logger.warning("RAZORPAY_KEY_ID / RAZORPAY_KEY_SECRET not set; payments will fail.")

    http = http or httpx.AsyncClient(timeout=settings.provider_timeout_seconds)
    provider = provider or GeminiProvider(
        http,
        settings.gemini_endpoint,
        api_key=settings.gemini_api_key,
        retries=settings.provider_retries,
        base_delay=settings.provider_base_delay_seconds,
    )
    jobs = InMemoryJobStore()
    generator = SiteGenerator(provider)
    return AppState(
        settings=settings,
        jobs=jobs,
        orders=InMemoryOrderStore(demo_orders() if settings.seed_demo_orders else None),
        generator=generator,
        driver=StreamDriver(jobs, generator, deadline_seconds=settings.job_deadline_seconds),
        gateway=RazorpayGateway(
            http,
            settings.razorpay_key_id,
            settings.razorpay_key_secret,
            base_url=settings.razorpay_base_url,
            currency=settings.payment_currency,
        ),
        http=http,
    )
