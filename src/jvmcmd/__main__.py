from jvmcmd.cli import main

raise SystemExit(main())
