import logging
from typing import Any

from langchain_openai import ChatOpenAI

logger = logging.getLogger(__name__)


class ClientFactory:
    """
    Builds LangChain chat clients for the operator's chat runtime.
    """

    def create_chat_client(self, llm_config: Any) -> ChatOpenAI:
        """
        Create a streaming ChatOpenAI client from the ``llm`` settings section.

        The API key falls back to OPENAI_API_KEY when not configured.
        """
        init_kwargs = {
            "model": llm_config.model,
            "streaming": True,
        }

        if llm_config.base_url:
            base_url = llm_config.base_url.rstrip("/")
            # OpenAI compatible servers expect the /v1 prefix
            if not base_url.endswith("/v1"):
                base_url = f"{base_url}/v1"
            init_kwargs["base_url"] = base_url

        if llm_config.api_key is not None:
            init_kwargs["api_key"] = llm_config.api_key.get_secret_value()

        for param in ("temperature", "max_tokens"):
            value = getattr(llm_config, param, None)
            if value is not None:
                init_kwargs[param] = value

        logger.info("Creating ChatOpenAI client for '%s'", llm_config.model)
        return ChatOpenAI(**init_kwargs)
