from solid_demos.main import main

main()
