from jico import main

main(prog_name="jico")
