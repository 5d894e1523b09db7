"""AI summarization components"""

from .prompts import SUMMARIZE_INSTRUCTION, build_prompt
from .summarizer import TextSummarizer

__all__ = ["SUMMARIZE_INSTRUCTION", "build_prompt", "TextSummarizer"]
