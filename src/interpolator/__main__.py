from interpolator.cli import main

main()
