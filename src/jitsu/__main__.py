from jitsu.main import main

main()
