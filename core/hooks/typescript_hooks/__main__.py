from typescript_hooks.cli import app

app(prog_name="typescript-hooks")
