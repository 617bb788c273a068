from langchain_openai import ChatOpenAI
from langchain_core.prompts import ChatPromptTemplate
from langchain_core.output_parsers import StrOutputParser

from app.config.settings import settings


class PostChain:
    """Single chat-completion call: system + user message in, raw text out."""

    def __init__(self):
        # Prompt text is passed as variables so its JSON braces are never parsed as placeholders
        self.prompt = ChatPromptTemplate.from_messages([
            ("system", "{system_prompt}"),
            ("human", "{user_prompt}"),
        ])
        self.output_parser = StrOutputParser()

    def _get_llm(self) -> ChatOpenAI:
        """Build the chat model. No retries: a failed call fails the request."""
        return ChatOpenAI(
            model=settings.openai_model,
            api_key=settings.openai_api_key,
            temperature=settings.generation_temperature,
            timeout=settings.openai_timeout,
            max_retries=0
        )

    # Called by: generator.py -> PostGeneratorService.generate_post
    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """Send the composed prompt and return the model's raw reply."""
        llm = self._get_llm()
        chain = self.prompt | llm | self.output_parser

        result = await chain.ainvoke({
            "system_prompt": system_prompt,
            "user_prompt": user_prompt
        })
        return result


# Global chain instance
post_chain = PostChain()
