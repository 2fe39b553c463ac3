from key_check.app import main

if __name__ == "__main__":
    main()
