# Third-party service integrations.
