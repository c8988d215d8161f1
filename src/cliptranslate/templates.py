"""Default files written by `cliptranslate init`."""

DEFAULT_CONFIG_YAML = """\
# ClipTranslate configuration.
# Strings must use single quotes.

# Language name or code to translate into (see `cliptranslate languages`).
target_language: 'Turkish'

# Seconds to wait for a single provider. Use null to wait indefinitely.
provider_timeout: 10.0

# Providers are queried in this order; results keep the same order.
# If none is enabled, all of them are used.
providers:
  google:
    enabled: true
  yandex:
    enabled: false
    api_key: null
  tureng:
    enabled: true
    max_results: 5
  seslisozluk:
    enabled: true
    max_results: 5
  prompt:
    enabled: true

clipboard:
  poll_interval: 0.5

analytics:
  tracking_id: null
"""
