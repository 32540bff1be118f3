from modscaffold.pipeline import main

main()
