from code_enforcer.cli.main import main

raise SystemExit(main())
