"""
Prompts for race data summarization
"""

# "Please summarize the following text."
SUMMARIZE_INSTRUCTION = "次の文章を要約してください。"


def build_prompt(text: str) -> str:
    """Prefix the fixed instruction to the extracted text"""
    return f"{SUMMARIZE_INSTRUCTION} {text}"
