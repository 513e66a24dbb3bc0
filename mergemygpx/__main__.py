from mergemygpx.cli import app

app(prog_name="mergemygpx")
