from handbook_combiner.cli import app

app(prog_name="handbook")
