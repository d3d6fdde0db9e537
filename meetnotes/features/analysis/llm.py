import instructor
import openai
import logging

logger = logging.getLogger("meetnotes.features.analysis.llm")

class LLMClientSettings:
    """
    Configuration settings for the LLM client.
    """
    def __init__(self, api_key: str, base_url: str = "https://api.openai.com/v1", model: str = "gpt-4o-mini", temperature: float = 0.3):
        self.api_key = api_key
        self.base_url = base_url
        self.model = model
        self.temperature = temperature

class LLMClient:
    """
    Client for interacting with Large Language Models.

    Wraps the OpenAI client (patched by instructor) to provide a streamlined interface for
    sending messages and receiving completion responses from the configured LLM.
    """
    def __init__(self, settings: LLMClientSettings):
        self.client = instructor.patch(openai.OpenAI(api_key=settings.api_key, base_url=settings.base_url))
        self.model = settings.model
        self.temperature = settings.temperature

    def chat(self, messages: list[dict]) -> str:
        """
        Sends a list of messages to the LLM and returns the response.
        """
        logger.debug(f"Sending {len(messages)} messages to {self.model}")
        response = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=self.temperature
        )
        return response.choices[0].message.content
