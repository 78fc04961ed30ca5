import logging
from typing import Optional

from supabase import Client, create_client
from supabase.client import ClientOptions

from humadero.core.config import Settings

logger = logging.getLogger(__name__)


def create_supabase_client(settings: Settings) -> Optional[Client]:
    """Build the one Supabase client the application owns, or None for demo mode."""
    if not settings.SUPABASE_URL:
        logger.warning("SUPABASE_URL not set - running without a database (demo mode)")
        return None
    if not settings.SUPABASE_KEY:
        logger.warning("SUPABASE_URL set but no SUPABASE_SERVICE_ROLE/SUPABASE_KEY - running in demo mode")
        return None

    options = ClientOptions(postgrest_client_timeout=settings.DB_TIMEOUT_SECONDS)
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY, options=options)
