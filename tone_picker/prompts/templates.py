TONE_ADJUSTMENT_PROMPT = """Rewrite the following text to have a {tone_description} tone. Maintain the same meaning and content, but adjust the language style accordingly. Return ONLY the rewritten text without any explanations, quotes, or formatting.

Original text: "{text}"

Rewritten text:"""
