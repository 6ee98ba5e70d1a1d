from showreel.cli import main

main()
