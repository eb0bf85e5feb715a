"""Conway's Game of Life: colony, timer, stepping modes and the state machine."""