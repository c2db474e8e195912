AI_STATUS_MESSAGE = "ollama is running just fine!"

# Reported verbatim; not read from any installed package.
AI_VERSION_MESSAGE = "ollama version is 0.15.4"

TEMPERATURE_MESSAGE = "Temperature - you can survive"
