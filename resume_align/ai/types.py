from typing import Protocol


class AIClient(Protocol):
    @property
    def model(self) -> str: ...

    async def complete_json(
        self,
        *,
        system_prompt: str,
        user_prompt: str,
        max_output_tokens: int = 900,
    ) -> str: ...
