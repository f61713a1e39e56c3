from dosdatetime.cli import app

app(prog_name="dosdatetime")
