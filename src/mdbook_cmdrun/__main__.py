from mdbook_cmdrun.cli.cli import main

if __name__ == "__main__":
    main()
