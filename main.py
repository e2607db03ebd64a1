"""
This script demonstrates the usage of the genai_content library.

It builds a short conversation, serializes it to its wire representation, then parses
the serialized history back twice with a single cache to show that repeated text parts
are reused rather than rebuilt.
"""

import logging
import os
from dotenv import load_dotenv
load_dotenv()
from genai_content import Cache, ChatHistory, Content, DataPart, TextPart, parse_content

logging.basicConfig(level=os.getenv("GENAI_CONTENT_LOG_LEVEL", "INFO"))

# Build a conversation
history = ChatHistory([
    Content.text("Hello, how are you?"),
    Content.model([TextPart(text="Arr, I be fine, matey!")]),
    Content.multi([TextPart(text="Tell me about the sea."), TextPart(text="Answer like a pirate.")])
])

# Serialize the history; this is what a transport would encode and send
wire = history.to_json()
print(wire)

# Every request re-sends the whole history; parse it twice with the same cache
cache = Cache()
first = [parse_content(turn, cache) for turn in wire]
second = [parse_content(turn, cache) for turn in wire]

shared = all(a is b for x, y in zip(first, second) for a, b in zip(x.parts, y.parts))
print(f"Parsed {len(first)} turns twice, {len(cache)} distinct texts cached, parts shared: {shared}")

# Inline data can be built and serialized (set GENAI_CONTENT_SAMPLE_FILE in .env)
sample_file = os.getenv("GENAI_CONTENT_SAMPLE_FILE")
if sample_file:
    history.append(Content.multi([DataPart.from_file(sample_file), TextPart(text="What is in this file?")]))
    print(history[-1].to_json()["parts"][0]["inlineData"]["mimeType"])

print(history.count_parts())
