from build_identity.cli import app

app(prog_name="build-identity")
