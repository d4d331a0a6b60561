from gpt5_mcp.main import cli

cli()
