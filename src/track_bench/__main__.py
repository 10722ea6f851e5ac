from track_bench.cli import main

raise SystemExit(main())
