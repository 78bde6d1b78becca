from toc_hook.main import main

raise SystemExit(main())
