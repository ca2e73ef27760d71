"""Start-up providers that populate the component container."""
