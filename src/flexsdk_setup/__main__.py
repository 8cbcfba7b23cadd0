from flexsdk_setup.action_runner import main

main()
