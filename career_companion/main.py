"""
Command-line entry point for the Career Companion.

Runs a component self-check (configuration, document store, AI provider)
so a fresh install can be verified before starting the Streamlit UI.
"""

import asyncio
import sys

from .config import PersistedState, get_config, open_store, validate_config
from .ai_processing import get_llm_manager
from .utils import setup_logging, get_logger

logger = get_logger("career_companion")

async def check_system_components(ping_provider: bool = True) -> bool:
    """Test all system components to ensure they're working correctly."""
    logger.info("Starting system component checks")

    logger.info("Checking configuration...")
    issues = validate_config()
    for error in issues["errors"]:
        logger.warning(f"Configuration error: {error}")
    for warning in issues["warnings"]:
        logger.warning(f"Configuration warning: {warning}")
    logger.info("✅ Configuration loaded")

    logger.info("Checking document store...")
    try:
        store = open_store()
        state = PersistedState(store)
        applications = state.load_applications()
        state.save_applications(applications)
        logger.info(f"✅ Document store working ({len(applications)} applications)")
        for key, stats in store.get_stats().items():
            logger.info(f"  {key}: {stats['size']} bytes, updated {stats['updated_at']}")
    except Exception as e:
        logger.error(f"❌ Document store failed: {e}")
        return False

    logger.info("Checking AI provider...")
    llm_manager = get_llm_manager()
    info = llm_manager.get_provider_info()
    logger.info(f"Provider info: {info}")
    if not info["available"]:
        logger.warning("⚠️ No Gemini API key - AI features are disabled")
    elif ping_provider:
        response = await llm_manager.test_connection()
        if response.success:
            logger.info(f"✅ Gemini responded using {response.model}")
        else:
            logger.error(f"❌ Gemini request failed: {response.error}")
            return False

    logger.info("🎉 All system components checked")
    return True

async def main() -> int:
    """Main application entry point."""
    config = get_config()
    setup_logging(config)

    if await check_system_components():
        logger.info("System is ready. Start the UI with: streamlit run career_companion/ui/app.py")
        return 0

    logger.error("System component checks failed. Please check configuration.")
    return 1

def run() -> None:
    sys.exit(asyncio.run(main()))

if __name__ == "__main__":
    run()
