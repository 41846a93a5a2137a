"""Hotel booking HTTP service: customer accounts, access tokens and rooms."""
