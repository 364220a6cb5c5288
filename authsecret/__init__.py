from .create_secrets import generate
