from .cli import app

app(prog_name="ed25519-parser")
