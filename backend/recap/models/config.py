from recap.models.llm import ModelChoice

# Summary, concept map and language detection share one model
SUMMARIZATION_MODEL = ModelChoice.OPENAI_GPT35_TURBO
