from asselect.cli import app

app(prog_name="asselect")
