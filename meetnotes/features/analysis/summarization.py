import asyncio
import logging

from meetnotes.core.exceptions import GenerationError
from meetnotes.features.analysis.llm import LLMClient

logger = logging.getLogger("meetnotes.features.analysis.summarization")

class Summarizer:
    """
    Generates meeting summaries from raw transcripts using an LLM.

    The user's instruction prompt decides what the summary should contain; the fixed
    system prompt only pins the output to the markdown subset the summary view renders.
    """

    SYSTEM_PROMPT = """
    You are an Elite Executive Assistant who turns meeting transcripts into concise,
    professional and actionable summaries.

    Format the answer in Markdown using only:
    # / ## / ### headings, - bullet points, **bold** and *italic*.
    Separate paragraphs with a blank line. Do not use tables, code blocks or links.

    Be direct and objective. Infer context where possible, but strictly
    **DO NOT hallucinate** facts.
    """

    USER_PROMPT = """
    {instructions}

    --- BEGIN TRANSCRIPT ---
    {transcript_text}
    --- END TRANSCRIPT ---
    """

    def __init__(self, llm: LLMClient):
        self.llm = llm

    def summarize(self, transcript: str, instructions: str) -> str:
        """
        Summarizes the transcript following the given instructions.
        """
        messages = [
            {"role": "system", "content": self.SYSTEM_PROMPT},
            {"role": "user", "content": self.USER_PROMPT.format(instructions=instructions, transcript_text=transcript)}
        ]

        content = self.llm.chat(messages)
        if content is None:
            raise GenerationError("LLM returned an empty completion")
        return content.strip()

    async def generate(self, transcript: str, instructions: str) -> str:
        """
        Runs the blocking LLM call in a worker thread so the UI loop stays responsive.
        """
        logger.info(f"Summarizing transcript ({len(transcript)} chars) with {self.llm.model}")
        return await asyncio.to_thread(self.summarize, transcript, instructions)
