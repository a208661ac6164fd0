from montyhall import main

config = {
    'iterations': 1_000_000,
    'rules': {
        # The host must always have a goat to open, so at least 3
        'door_count': 3,
    },
    # None draws fresh entropy each run; set an int to reproduce a run
    'seed': None,
    # 0 -- report only
    # 1 -- progress lines around the run
    # 2 -- dump every trial (only sensible with small iteration counts)
    'verbose': 0,
}


if __name__ == "__main__":
    main(config)
