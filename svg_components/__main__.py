from svg_components.cli import app

app(prog_name="svg-components")
