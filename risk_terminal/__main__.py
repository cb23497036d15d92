from risk_terminal.cli.main import app

app(prog_name="risk-terminal")
