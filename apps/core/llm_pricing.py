"""
Static pricing map (USD per 1M text tokens) for the chat models the
assistant can be pointed at. Models missing here are listed as "cost unknown".
"""

PRICING_PER_1M = {
    "gpt-4.1": {"input": 2.00, "output": 8.00},
    "gpt-4.1-mini": {"input": 0.40, "output": 1.60},
    "gpt-4.1-nano": {"input": 0.10, "output": 0.40},
    "gpt-4o": {"input": 2.50, "output": 10.00},
    "gpt-4o-mini": {"input": 0.15, "output": 0.60},
    "gpt-5": {"input": 1.25, "output": 10.00},
    "gpt-5-mini": {"input": 0.25, "output": 2.00},
    "gpt-5-nano": {"input": 0.05, "output": 0.40},
}

# Only chat-capable families are offered in the model picker
CHAT_MODEL_PREFIXES = ("gpt-4", "gpt-5", "o3", "o4")
